"""Service layer: orchestrates read -> scan -> build -> render -> write."""
