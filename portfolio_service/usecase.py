"""Application services sitting between the HTTP layer and the stores."""

from __future__ import annotations

from .domain import About, Hero, Portfolio, ServiceItem, Services
from .repository import (
    AboutRepository,
    HeroRepository,
    PortfolioRepository,
    ServicesRepository,
)


class AboutUsecase:
    """Reads and updates the about section."""

    def __init__(self, repository: AboutRepository) -> None:
        self._repository = repository

    def get_about(self) -> About:
        return self._repository.get_about()

    def update_about(self, about: About) -> About:
        return self._repository.update_about(about)


class HeroUsecase:
    """Reads the hero banner."""

    def __init__(self, repository: HeroRepository) -> None:
        self._repository = repository

    def get_hero(self) -> Hero:
        return self._repository.get_hero()


class PortfolioUsecase:
    """Reads the portfolio section."""

    def __init__(self, repository: PortfolioRepository) -> None:
        self._repository = repository

    def get_portfolio(self) -> Portfolio:
        return self._repository.get_portfolio()


class ServicesUsecase:
    """Lists, creates, updates and deletes services."""

    def __init__(self, repository: ServicesRepository) -> None:
        self._repository = repository

    def get_services(self) -> Services:
        return self._repository.get_services()

    def create_service(self, service: ServiceItem) -> ServiceItem:
        return self._repository.create_service(service)

    def update_service(self, service: ServiceItem) -> ServiceItem:
        return self._repository.update_service(service)

    def delete_service(self, service_id: int) -> None:
        self._repository.delete_service(service_id)

    def update_summary(self, summary: str) -> Services:
        return self._repository.update_summary(summary)