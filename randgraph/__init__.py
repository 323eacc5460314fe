"""Random graph generation as lazy streams of vertices and edges."""
