"""Cross-platform conversational relay."""
