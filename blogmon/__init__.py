"""
Blogmon engine.

Scores blog posts for novelty, relevance and community attention, tags them
with topics, links related posts and ranks trending topics.
"""

__version__ = "1.0.0"
