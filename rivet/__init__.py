"""
Rivet - a retro desktop simulator.

A widget toolkit (windows, buttons, text inputs, modals) drawn onto a
palette-indexed raster surface, with focus, capture and modal routing,
and a few small desktop applications.

Packages:
- core: geometry, events, configuration, system log
- graphics: surface, palette, fonts, interface drawer
- ui: widgets and the focus/capture/modal manager
- runtime: sessions, headless harness, pygame desktop host
- apps: bundled applications
"""

__version__ = "0.1.0"
