"""HTTP composition: application factory, lifespan and routers."""
