from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

from wordstack_app import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 3001)), debug=True)
