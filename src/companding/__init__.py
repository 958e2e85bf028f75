"""ITU-T G.711 companding (A-law and mu-law) over 16-bit linear PCM.

Every transform here is a pure function: scalar forms work on one sample or
one code, array forms on numpy arrays and ``bytes``, and the ``*_into``
wrappers write into caller-owned buffers.
"""
