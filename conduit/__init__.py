"""Article persistence for the Conduit publishing backend."""
