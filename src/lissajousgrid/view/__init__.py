"""
The VIEW layer: Qt widgets that paint controller snapshots and forward
user input. No geometry is computed here beyond what the model provides.
"""
