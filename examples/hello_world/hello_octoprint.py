"""Hello OctoPrint example."""

from octorest.client import OctoPrintClient, models

# Host and API key are loaded from OCTOPRINT_HOST / OCTOPRINT_API_KEY or config.json
client = OctoPrintClient.from_settings()

print(client.get_api_version().text)

state = client.printer.get_state()
if state.state:
    print(f"State: {state.state.text}")
if state.temperature:
    for name, reading in state.temperature.heaters.items():
        print(f"  {name}: {reading.actual}°C (target {reading.target})")

print("Files:")
for entry in models.walk(client.files.list(recursive=True).files):
    print(f"- {entry.path}")
