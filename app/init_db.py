from app.database import Base, engine
import app.models  # registers every model on Base.metadata

def main():
    Base.metadata.create_all(bind=engine)
    print("✅ CHMS tables created successfully")

if __name__ == "__main__":
    main()
