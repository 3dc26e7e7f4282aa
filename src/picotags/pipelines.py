"""pipelines"""

from collections.abc import Mapping
from typing import Any

from picotags import config
from picotags.content import ContentRepository, PagePipeline, RenderResult
from picotags.logging import get_logger
from picotags.plugin import TagsPlugin, TagsPluginConfig
from picotags.tags import page_labels


def _merge_config(cli_options: Mapping[str, Any] | None) -> dict[str, Any]:
    return config.get_config(cli_options or {})


def _format_labels(labels: list[str]) -> str:
    return "[" + ", ".join(labels) + "]"


def build_pipeline(settings: Mapping[str, Any]) -> PagePipeline:
    verbose = bool(settings.get("verbose_logging", False))
    plugin = TagsPlugin(
        config=TagsPluginConfig.from_settings(settings),
        logger=get_logger("picotags.plugin", verbose),
    )
    return PagePipeline(
        repository=ContentRepository.from_settings(settings),
        plugin=plugin,
        logger=get_logger("picotags.pipeline", verbose),
    )


def render_page(cli_options: Mapping[str, Any] | None = None) -> RenderResult:
    settings = _merge_config(cli_options)
    pipeline = build_pipeline(settings)
    return pipeline.run(str(settings.get("page") or "index"))


def run_pages(cli_options: Mapping[str, Any] | None = None) -> int:
    """
    Pages command: list the pages visible from the requested page.
    """

    result = render_page(cli_options)
    current_id = str(result.current_page.get("id", ""))
    filter_labels = page_labels(result.current_page, "filter")

    print(f"Page: {current_id}")
    print(f"Tags: {_format_labels(list(result.state.page_tags))}")
    if result.state.is_filtered:
        print(f"Filter: {_format_labels(filter_labels)}")
    elif filter_labels:
        print(f"Filter: {_format_labels(filter_labels)} (no matches; showing all pages)")
    else:
        print("Filter: (none)")

    for page_id, page in result.visible_pages.items():
        print(f"  {page_id}\t{page.get('title', page_id)}\t{_format_labels(page_labels(page))}")
    return 0


def run_init(cli_options: Mapping[str, Any] | None = None) -> int:
    """Init command."""

    logger = get_logger("picotags.init", False)
    init_result = config.initialize_config(cli_options)

    if init_result.config_created:
        logger.info("Config created at %s", init_result.config_path)
        print(f"Config: created {init_result.config_path}")
    elif init_result.config_updated_keys:
        logger.info(
            "Config updated at %s (added: %s)",
            init_result.config_path,
            ", ".join(init_result.config_updated_keys),
        )
        print(f"Config: updated {init_result.config_path}")
    else:
        logger.info("Config already exists at %s", init_result.config_path)
        print(f"Config: exists {init_result.config_path}")
    return 0
