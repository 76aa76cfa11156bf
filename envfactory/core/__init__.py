"""Core building blocks shared across envfactory."""
