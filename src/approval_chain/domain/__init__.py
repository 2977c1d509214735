"""Domain layer - approval chain business logic."""
