"""RouteLog: trace a route on a map and log it as a workout."""

__version__ = "0.1.0"
