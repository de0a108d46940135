"""SiteCraft: AI-assisted website generator service."""
