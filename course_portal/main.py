"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the content server,
or runs the chart image update used by the CI workflow.
"""

import argparse
import logging

from course_portal.bootstrap import bootstrap_create_server
from course_portal.config import config_load_settings
from course_portal.domain import ImageReference
from course_portal.errors import CoursePortalError
from course_portal.logging_config import logging_configure
from course_portal.release import release_update_chart_image

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Raises:
        SystemExit: Raised with status 1 when startup or the command fails.
    """

    argument_parser = argparse.ArgumentParser(description="Course Portal runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "bump-chart"),
        help="Runtime command: `serve` starts the content server, "
        "`bump-chart` points the chart values at a new image tag",
        type=str,
    )
    argument_parser.add_argument(
        "--values-file",
        dest="values_file",
        type=str,
        help="Chart values file for `bump-chart`",
    )
    argument_parser.add_argument("--tag", dest="tag", type=str, help="New image tag for `bump-chart`")
    argument_parser.add_argument(
        "--repository",
        dest="repository",
        type=str,
        help="Optional new image repository for `bump-chart`",
    )
    argument_parser.add_argument(
        "--image",
        dest="image",
        type=str,
        help="New image reference `repository[:tag]` for `bump-chart`, instead of --tag/--repository",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.command == "bump-chart":
        if not parsed_arguments.values_file or not (parsed_arguments.tag or parsed_arguments.image):
            argument_parser.error("bump-chart requires --values-file and either --tag or --image")
        if parsed_arguments.image and (parsed_arguments.tag or parsed_arguments.repository):
            argument_parser.error("--image cannot be combined with --tag or --repository")
        logging_configure()
        try:
            if parsed_arguments.image:
                requested_reference = ImageReference.parse(parsed_arguments.image)
                tag, repository = requested_reference.tag, requested_reference.repository
            else:
                tag, repository = parsed_arguments.tag, parsed_arguments.repository
            image_reference = release_update_chart_image(
                values_path=parsed_arguments.values_file,
                tag=tag,
                repository=repository,
            )
        except (CoursePortalError, ValueError) as error:
            logger.error("Chart update failed: %s", error)
            raise SystemExit(1) from error
        print(image_reference.render())
        return

    try:
        settings = config_load_settings()
        logging_configure(settings.log_level)
        server = bootstrap_create_server(settings)
        server.server_run()
    except CoursePortalError as error:
        logger.error("Startup failed: %s", error)
        raise SystemExit(1) from error


if __name__ == "__main__":
    main()
