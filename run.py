import os

from dotenv import load_dotenv

# Loads environment variables (DATABASE_URI, STORE_BACKEND, ...) from the .env file
load_dotenv()

from rcm_analyzer import create_app

app = create_app(os.environ.get('FLASK_CONFIG', 'default'))

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get('PORT', 5001)))
