# apps/subscriptions/management/commands/subscriber_report.py

"""
Subscriber Report Management Command

Usage:
    python manage.py subscriber_report
    python manage.py subscriber_report --list
    python manage.py subscriber_report --check ferris@rust-lang.org
"""
from django.core.management.base import BaseCommand, CommandError

from apps.domain.models import StoreConnectivityError
from apps.infrastructure.container import get_service_info
from apps.subscriptions.views import get_subscription_service


class Command(BaseCommand):
    help = "Report on newsletter subscribers"

    def add_arguments(self, parser):
        parser.add_argument(
            "--list",
            action="store_true",
            help="Print every subscribed email, sorted",
        )
        parser.add_argument(
            "--check",
            type=str,
            metavar="EMAIL",
            help="Report whether one email is subscribed",
        )

    def handle(self, *args, **options):
        service = get_subscription_service()

        self.stdout.write("=" * 70)
        self.stdout.write(
            self.style.SUCCESS(f"Subscriber Report (store: {service.store_type})")
        )
        info = get_service_info()
        self.stdout.write(f"Environment: {info['environment']}")
        self.stdout.write(f"Set key: {info['store']['key']}")
        self.stdout.write("=" * 70)

        try:
            self.stdout.write(f"\nTotal Subscribers: {service.count()}")

            if options["check"]:
                self._check(service, options["check"])

            if options["list"]:
                self._list(service)

        except StoreConnectivityError as e:
            raise CommandError(f"Subscriber store unavailable: {e}") from e

    def _check(self, service, email):
        """Print membership for a single email"""
        if service.is_subscribed(email):
            self.stdout.write(self.style.SUCCESS(f"{email} is subscribed"))
        else:
            self.stdout.write(self.style.WARNING(f"{email} is not subscribed"))

    def _list(self, service):
        """Print all subscribers"""
        emails = service.list_subscribers()

        self.stdout.write("\nSubscribers:")
        if not emails:
            self.stdout.write("  (none)")
        for email in emails:
            self.stdout.write(f"  {email}")
