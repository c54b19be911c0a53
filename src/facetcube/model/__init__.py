"""
The MODEL layer contains pure data structures: face grids, palette, style
parameters, instance transforms and the scene state.
It has NO knowledge of the Visualization (PyVista).
"""
