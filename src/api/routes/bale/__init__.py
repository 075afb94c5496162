"""Endpoints HTTP do canal Bale (webhook inbound e execução outbound)."""
