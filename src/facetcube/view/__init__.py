"""
The VIEW layer adapts instance pools to PyVista meshes.
"""
