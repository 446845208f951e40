"""
vecpath is the path geometry engine behind a scripting host: lengths,
sampling, orientation, arcs, offsets and trimming of flat M/L/C/Z token
streams.
"""
