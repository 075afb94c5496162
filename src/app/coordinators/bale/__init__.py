"""Coordinators Bale — fluxo inbound do webhook."""

from app.coordinators.bale.inbound import process_inbound_update, select_file_id

__all__ = ["process_inbound_update", "select_file_id"]
