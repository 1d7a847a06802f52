"""
folio - data-driven personal portfolio site

Loads one JSON content document and renders it into the sections of a
single-page portfolio, then keeps the page navigation in sync.

Architecture:
- Content Context: Content document loading, typed read-only model, fallback document
- Rendering Context: Icon resolution, view models, fragment templates, DOM mutation
- Navigation Context: Active-section reducer, scrollspy, hash routing, menu, fade-in reveal
- Serving Context: Static file server for the page shell and its assets
"""

__version__ = "0.1.0"
