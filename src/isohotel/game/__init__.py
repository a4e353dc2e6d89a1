"""Game core: state, projection, movement, chat and the engine that drives them."""
