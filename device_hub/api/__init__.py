# API layer - routes, schemas and views
