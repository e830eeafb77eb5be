"""FastAPI app internals: request bodies and response builders."""
