"""Application layer: input contracts, DTOs and services."""
