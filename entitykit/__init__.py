"""Entity-component building blocks for small games: entities, systems, health,
lifetimes, movement, collisions, cameras, resource caching, bullets and enemies."""

__version__ = "0.1.0"