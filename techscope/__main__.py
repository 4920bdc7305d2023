"""Run the API server: python -m techscope"""

from techscope.main import run

run()
