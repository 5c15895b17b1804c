"""Schools infrastructure: HTTP routes for learners, parents and school events."""
