"""ICS unfolding, event extraction and Markdown formatting."""
