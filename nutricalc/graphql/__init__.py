"""GraphQL surface for the nutrition calculator."""
