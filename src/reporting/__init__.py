"""Reporting module - renders daily reports."""

from .sinks import CollectingReportSink, ConsoleReportSink, ReportSink

__all__ = ["ReportSink", "ConsoleReportSink", "CollectingReportSink"]
