"""
The CONTROLLER layer holds the algorithms: configuration generators,
the face orientation table and the layout engine.
"""
