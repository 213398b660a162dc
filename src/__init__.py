"""
LaunchIn7 Website Scanner

Scores a website with Lighthouse and turns the result into a gamified outcome:
1. Scans desktop and mobile with PageSpeed Insights
2. Aggregates four category scores into an overall score, tier and badge
3. Resolves the outcome screen (copy, CTAs, A/B variants, personalization)
4. Generates quick wins and gates leaderboard submissions
"""

__version__ = "1.0.0"
