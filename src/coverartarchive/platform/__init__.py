"""Platform adapters (logging, HTTP) shared by the client."""
