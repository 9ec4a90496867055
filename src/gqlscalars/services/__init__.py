"""Service layer: coercion operations returning ServiceResult."""
