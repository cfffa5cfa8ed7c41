"""Load and search Lenny's Podcast transcripts."""
