"""
Web interface module for Challonge points.

Provides FastAPI-based web server for:
- Exporting tournament matches as CSV
- Exporting event points tables as CSV or JSON
"""
