"""Pydantic records for per-plot alerts."""

from __future__ import annotations

from pydantic import BaseModel

from paddysense.models.enums import AlertGroupEnum, AlertSeverityEnum
from paddysense.schemas.crop import RECORD_CONFIG


class PlotAlert(BaseModel):
	model_config = RECORD_CONFIG

	id: str
	plot_id: str
	plot_name: str
	category: str
	group: AlertGroupEnum
	title: str
	message: str
	severity: AlertSeverityEnum
	icon: str
	completable: bool = False
