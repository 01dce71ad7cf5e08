"""Lawn Defense simulation core: plants, zombies, peas, suns and the world that runs them."""
