"""Filing infrastructure: on-disk storage and HTTP routes for images and videos."""
