"""Domain objects (records, store aggregate) independent of HTTP and disk."""
