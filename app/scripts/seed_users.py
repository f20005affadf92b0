from sqlmodel import Session
from app.database import create_db_and_tables, engine
from app.services.users import create_default_users

def seed_users():
    create_db_and_tables()
    with Session(engine) as session:
        created = create_default_users(session)
        for user in created:
            print(f"✅ Creado usuario {user.email} ({user.role.value})")
        if not created:
            print("Los usuarios por defecto ya existen.")
    print("🎉 Seed completado.")

if __name__ == "__main__":
    seed_users()
