"""Tick-by-tick simulator with selection, load and release timings and a console menu."""