"""Services Layer: game catalog operations between routes and the store."""
