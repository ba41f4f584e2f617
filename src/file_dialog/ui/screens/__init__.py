"""
UI Screens - Full dialog components with data binding.
The final layer of the atomic design hierarchy.
"""
