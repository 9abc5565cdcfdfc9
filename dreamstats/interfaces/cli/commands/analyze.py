"""
Analyze command: compute dream analytics from a JSON journal export.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dreamstats.components.analytics.analytics_comp import analytics_to_dict
from dreamstats.helpers.exceptions import ConfigError, DataSourceError
from dreamstats.helpers.logging_helper import setup_logging
from dreamstats.interfaces.cli.json_source import JsonFileSource
from dreamstats.interfaces.cli.ui import (
    InfoPanel,
    console,
    print_error,
    print_success,
    print_warning,
    show_analytics,
)
from dreamstats.services.config_svc import ConfigService
from dreamstats.services.domain.analytics_svc import AnalyticsService


def cmd_analyze(args: argparse.Namespace) -> int:
    """
    Load records, compute analytics and print them as tables or JSON.
    """
    config_service = ConfigService(
        overrides={
            "timezone": args.timezone,
            "lucid_trend_order": args.lucid_order,
            "top_n": args.top,
            "log_level": args.log_level,
        }
    )
    setup_logging(config_service.get("log_level"))

    try:
        analytics_config = config_service.get_analytics_config()
        cache_size = config_service.get_cache_size()
    except ConfigError as e:
        print_error(f"Invalid configuration: {e}")
        return 1

    try:
        source = JsonFileSource(Path(args.dreams), Path(args.interpretations) if args.interpretations else None)
    except DataSourceError as e:
        print_error(str(e))
        return 1

    service = AnalyticsService(source, analytics_config, cache_size=cache_size)
    analytics = service.get_dream_analytics(args.user_id)
    data = analytics_to_dict(analytics)

    if args.output:
        if args.json:
            print_warning("--json is ignored when --output is given")
        output = Path(args.output)
        try:
            output.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        except OSError as e:
            print_error(f"Cannot write {output}: {e.strerror or e}")
            return 1
        print_success(f"Wrote analytics for {analytics.lucid_dream_progress.total_dreams} dreams to {output}")
        return 0

    if args.json:
        console.print_json(data=data)
        return 0

    owner = f"user {args.user_id}" if args.user_id else "all users"
    if analytics.lucid_dream_progress.total_dreams == 0:
        InfoPanel.show("Dream Analytics", f"No dreams found for {owner}")
        return 0

    logging.debug(f"[cli] Rendering analytics for {owner}")
    show_analytics(analytics, title=f"Dream Analytics - {owner}")
    return 0
