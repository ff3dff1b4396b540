"""Export Desk: resource-list client for the garment export operations backend."""
