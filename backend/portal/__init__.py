"""Student association portal backend."""
