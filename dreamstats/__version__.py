"""Version information for dreamstats."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the DreamAnalytics shape or config keys
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Configurable lucid trend ordering and CLI
#         - lucid_trend_order: "input" (default) or "calendar"
#         - `dreamstats analyze` with rich tables and --json output
#         - AnalyticsService memoizes results per (user_id, input hash)
# 0.1.0 - Initial release
#         - Pure aggregation pipeline for dream journal analytics
