"""matplotlib renderers for the information-quantity charts.

Import :mod:`infoquant.viz.plots` explicitly; it pulls in ``matplotlib.pyplot``.
"""
