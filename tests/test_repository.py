import pytest

from portfolio_service.domain import About, ServiceItem, ServiceNotFoundError
from portfolio_service.repository import (
    AboutRepository,
    HeroRepository,
    PortfolioRepository,
    ServicesRepository,
)


def test_get_about_returns_profile():
    about = AboutRepository().get_about()
    assert about.summary == "I am a Frontend and Mobile Developer."
    assert about.languages == ["Go", "JavaScript", "Dart"]
    assert [tool.name for tool in about.tools] == ["Android Studio", "VS Code"]


def test_update_about_returns_given_value():
    repo = AboutRepository()
    new = About(summary="Initial summary", languages=["Go"])
    assert repo.update_about(new) == new


def test_get_about_unaffected_by_update():
    repo = AboutRepository()
    repo.update_about(About(summary="changed"))
    assert repo.get_about().summary == "I am a Frontend and Mobile Developer."


def test_get_hero():
    hero = HeroRepository().get_hero()
    assert hero.name == "Salih Arya Gumilang"
    assert hero.photo == "/assets/images/hero-photo.jpeg"
    assert hero.description.endswith("and Traveloka.")


def test_get_portfolio():
    portfolio = PortfolioRepository().get_portfolio()
    assert portfolio.summary == "Summary Portfolio"
    assert [p.category for p in portfolio.projects] == ["Web Development", "Mobile App"]


def test_initial_services():
    services = ServicesRepository().get_services()
    assert services.summary == "Summary Services"
    assert [item.id for item in services.items] == [1]
    assert services.items[0].link_url == "https://example.com/project1"


def test_create_service_assigns_increasing_ids():
    repo = ServicesRepository()
    first = repo.create_service(ServiceItem(id=99, title="Mobile"))
    second = repo.create_service(ServiceItem(title="Design"))
    assert (first.id, second.id) == (2, 3)
    assert [item.id for item in repo.get_services().items] == [1, 2, 3]


def test_create_service_does_not_alter_input():
    repo = ServicesRepository()
    item = ServiceItem(id=99, title="Mobile")
    repo.create_service(item)
    assert item.id == 99


def test_update_service_replaces_item():
    repo = ServicesRepository()
    updated = repo.update_service(ServiceItem(id=1, title="Backend"))
    assert updated.title == "Backend"
    assert repo.get_services().items[0].title == "Backend"


def test_update_missing_service_raises():
    with pytest.raises(ServiceNotFoundError):
        ServicesRepository().update_service(ServiceItem(id=42))


def test_delete_service_removes_item():
    repo = ServicesRepository()
    created = repo.create_service(ServiceItem(title="Mobile"))
    repo.delete_service(1)
    assert [item.id for item in repo.get_services().items] == [created.id]


def test_delete_missing_service_raises():
    repo = ServicesRepository()
    repo.delete_service(1)
    with pytest.raises(ServiceNotFoundError):
        repo.delete_service(1)


def test_update_summary():
    repo = ServicesRepository()
    result = repo.update_summary("New summary")
    assert result.summary == "New summary"
    assert repo.get_services().summary == "New summary"


def test_repositories_do_not_share_state():
    first = ServicesRepository()
    first.create_service(ServiceItem(title="Mobile"))
    assert len(ServicesRepository().get_services().items) == 1