"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- The itinerary-generation service (HTTP)
- Document encoders (ReportLab PDF)
- Notification presentation (log, in-memory)
"""
