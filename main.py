"""Alfred emoji snippet pack builder - entry point."""
import argparse
import sys

from pipeline import run_pipeline
from alfred_emoji.utils import load_config, LOG_LEVELS, ConfigError, FetchError, setup_logging, get_logger
from alfred_emoji.version import validate_version_format

logger = get_logger(__name__)


def main():
    """Download the Unicode emoji registry and write the snippet pack."""
    parser = argparse.ArgumentParser(description='Alfred Emoji Snippet Pack Builder')
    parser.add_argument('--unicode-version', help='Unicode emoji registry version, e.g. 13.0')
    parser.add_argument('--output-dir', help='Directory the snippet pack is written to')
    parser.add_argument('--strip-emoji-version', action='store_true', default=None,
                        help='Drop the "E<version>" prefix from emoji names')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        help='Logging level. Default: INFO')

    args = parser.parse_args()
    setup_logging(level=args.log_level or "INFO")

    try:
        config = load_config(log_level=args.log_level)

        # Override with CLI args if provided
        if args.unicode_version:
            if not validate_version_format(args.unicode_version):
                raise ConfigError(f"Invalid Unicode version: {args.unicode_version}")
            config['unicode_version'] = args.unicode_version
        if args.output_dir:
            config['output_dir'] = args.output_dir
        if args.strip_emoji_version:
            config['strip_emoji_version'] = True
        if not args.log_level:
            setup_logging(level=config['log_level'])

        run_pipeline(config)

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except FetchError as e:
        logger.error(e)
        sys.exit(1)
    except OSError as e:
        logger.error(f"cannot write snippet pack: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
