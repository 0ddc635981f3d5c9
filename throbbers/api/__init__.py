"""HTTP layer: app factory, dependency container and routers."""
