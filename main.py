import os
import sys
import json
import logging
import argparse

from core.config_loader import get_config
from core.exceptions import CollabMatchError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_init_db(args) -> int:
    from database.init_db import init_db

    init_db()
    return 0


def run_recommend(args) -> int:
    """Generate (replace) team recommendations for one project."""
    from database.uow import matching_uow
    from core.matcher.service import TeamRecommendationService
    from notification.service import NotificationService

    config = get_config()
    with matching_uow() as repo:
        service = TeamRecommendationService(
            repo,
            config=config.matching.recommendations,
            notifier=NotificationService(repo)
        )
        recommendations = service.generate(args.project_id)
        for rec in recommendations:
            logger.info(f"  {rec.recommended_user_id}: {rec.compatibility_score:.2f} - {rec.reason}")

    logger.info(f"Stored {len(recommendations)} recommendations for project {args.project_id}")
    return 0


def run_match_event(args) -> int:
    """Run teammate matching for one event in the foreground."""
    from database.uow import matching_uow
    from core.app_context import AppContext

    ctx = AppContext.build(get_config())
    with matching_uow() as repo:
        result = ctx.teammate_service(repo).find_event_teammates(args.event_id)

    print(json.dumps(result.to_dict(), indent=2))
    return 0


def main():
    parser = argparse.ArgumentParser(description="CollabMatch Matching Driver")
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config.yaml (default: COLLABMATCH_CONFIG or ./config.yaml)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init-db', help='Create database tables')

    recommend = subparsers.add_parser('recommend', help='Generate team recommendations for a project')
    recommend.add_argument('--project-id', required=True)

    match_event = subparsers.add_parser('match-event', help='Run teammate matching for an event')
    match_event.add_argument('--event-id', required=True)

    args = parser.parse_args()

    if args.config:
        os.environ['COLLABMATCH_CONFIG'] = args.config
        get_config.cache_clear()

    handlers = {
        'init-db': run_init_db,
        'recommend': run_recommend,
        'match-event': run_match_event,
    }

    try:
        return handlers[args.command](args)
    except CollabMatchError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
