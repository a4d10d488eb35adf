"""Service layer: standup and repository registries over the config document."""
