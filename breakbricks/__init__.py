"""
Break the Bricks - a pygame brick-breaking arcade game.

Move the paddle with the arrow keys, keep the ball in play and break all
24 bricks across three increasingly fast phases.
"""

__version__ = "1.0.0"
