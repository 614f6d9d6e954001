"""Development entrypoint delegating to the application package."""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from pymongo.errors import PyMongoError

from solosphere.database import get_database, ping
from solosphere.main import create_app

app = create_app()


if __name__ == "__main__":
    with app.app_context():
        try:
            ping(get_database())
            app.logger.info("Pinged your deployment. You successfully connected to MongoDB!")
        except PyMongoError as e:
            app.logger.error(f"MongoDB ping failed: {e}")

    app.run(host="0.0.0.0", port=app.config["PORT"], debug=not app.config["PRODUCTION"])
