from airtable_gateway.main import run

run()
