"""Infrastructure adapters.

Adapters implement protocols defined in core/protocols/.
Each adapter wraps something the host owns (the analytics.js command
function, the ga.js queue, the tracking framework's registration points).
"""
