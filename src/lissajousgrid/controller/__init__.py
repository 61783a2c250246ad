"""
The CONTROLLER layer drives the model over time.
It owns the Qt timers and signals but never paints anything.
"""
