"""Backend for the page-to-AI browser extension: chat requests and two-stage video generation."""
