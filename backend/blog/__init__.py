"""Minimal blog backend: posts, image uploads and server-rendered pages."""
