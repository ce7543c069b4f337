# This package holds the Pydantic request and response contracts for the storefront backend.
# Each domain module mirrors one backend service; `common` holds the shared envelope.
