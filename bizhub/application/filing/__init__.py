"""Filing context: uploaded images and videos."""
