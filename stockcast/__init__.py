"""
StockCast Engine

Technical indicators, scored trading signals and regression forecasts
over an in-memory price series. Pure computation: no I/O, no state.
"""

__version__ = "0.1.0"
