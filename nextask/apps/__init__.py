"""Application screens of NexTask."""
