"""Simulator that writes tabular reports of processes, settings, events and results."""