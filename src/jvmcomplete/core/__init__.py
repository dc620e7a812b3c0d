"""Core building blocks shared by the completion components."""
