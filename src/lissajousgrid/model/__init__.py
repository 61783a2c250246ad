"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the GUI (Qt) or the phase clock.
It deals with Layout, intersection points and polyline storage.
"""
