"""Basic usage example for the weather client."""

import os

from weather_proxy import WeatherClient, classify


def main() -> None:
    api_key = os.environ["OPENWEATHER_API_KEY"]
    cities = {
        "Berlin": (52.52, 13.405),
        "Reykjavik": (64.1466, -21.9426),
        "Dubai": (25.2048, 55.2708),
    }
    with WeatherClient() as client:
        for name, (lat, lon) in cities.items():
            weather = client.current(lat, lon, api_key=api_key)
            description = weather.weather[0].description if weather.weather else "N/A"
            print(f"=== {name} ===")
            print(f"  {description}, {weather.main.temp:.2f} K ({classify(weather.main.temp).value})")
            for alert in weather.alerts or []:
                print(f"  ALERT: {alert.event}")


if __name__ == "__main__":
    main()
