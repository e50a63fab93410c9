"""Column analysis: value typing, temporal formats, statistics and schema resolution."""
