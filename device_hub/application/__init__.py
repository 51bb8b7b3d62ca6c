# Application layer - owned state and services
