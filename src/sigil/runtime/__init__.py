"""
Runtime package - clock, platform probes and the render loop
"""
