# This package contains the shared HTTP plumbing used by every storefront service.
# It exists so bearer-token injection, 401 eviction, and error mapping are implemented exactly once.
# Services receive an `ApiClient` and a `SessionStore` instead of building their own.
