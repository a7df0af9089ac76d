from infrastructure.football.football_data_client import FootballDataClient

__all__ = ["FootballDataClient"]
