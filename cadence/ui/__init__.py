# cadence/ui/__init__.py
# Terminal UI: theming, static displays & the interactive presenter
