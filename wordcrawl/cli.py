import argparse
import logging
import sys
from typing import List, Optional

from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigNotFoundError, CrawlAbortedError, InvalidConfigError
from wordcrawl.services.crawl_result_writer import CrawlResultWriter
from wordcrawl.services.page_parser import HtmlPageParser
from wordcrawl.services.protocols import PageParser, WebCrawler

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Parallel word-count web crawler')
    parser.add_argument('config', help='Path to the YAML (or JSON) crawl config file')
    parser.add_argument(
        '--verbose', '-v', action='count', default=0, help='Increase logging verbosity (-v for INFO, -vv for DEBUG)'
    )
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity == 1:
        log_level = logging.INFO
    elif verbosity >= 2:
        log_level = logging.DEBUG
    else:
        log_level = logging.WARNING

    # stdout carries the crawl result and profile
    logging.basicConfig(
        level=log_level, format='%(asctime)s - %(levelname)s - [%(name)s] %(message)s', stream=sys.stderr
    )
    library_log_level = logging.DEBUG if log_level < logging.INFO else logging.WARNING
    logging.getLogger('urllib3').setLevel(library_log_level)


def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    """Load the config, crawl, and write the result and the profile report.

    Returns the process exit code: 0 on success, 1 for config errors and 2
    when the crawl was aborted by a page failure.
    """
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)
    container = container or Container()

    try:
        data = container.config_file_store().load_required(args.config)
        crawl_config = container.config_parser().parse(data)
    except (ConfigNotFoundError, InvalidConfigError) as e:
        logger.error('Failed to load config: %s', e)
        return 1

    profiler = container.profiler()
    page_parser = profiler.wrap(PageParser, HtmlPageParser(container.http_service(), crawl_config.ignored_words))
    crawler = profiler.wrap(WebCrawler, container.crawler_factory().get(crawl_config, page_parser))

    try:
        result = crawler.crawl(crawl_config.start_pages)
    except CrawlAbortedError as e:
        logger.error('%s', e)
        return 2
    else:
        writer = CrawlResultWriter(result)
        if crawl_config.result_path:
            writer.write_to_path(crawl_config.result_path)
        else:
            writer.write(sys.stdout)
        return 0
    finally:
        # the report covers whatever ran, also when the crawl failed
        if crawl_config.profile_output_path:
            profiler.write_data_to_path(crawl_config.profile_output_path)
        else:
            profiler.write_data(sys.stdout)
