"""
connectn.interfaces - User interfaces for the connectn engine
"""
