from psycopg2.extensions import connection as Connection
from psycopg2.extras import RealDictCursor


def list_users_by_role(db: Connection, role: str) -> list:
    with db.cursor(cursor_factory=RealDictCursor) as cursor:
        cursor.execute(
            """SELECT id, username, firstname, lastname, email
            FROM users
            WHERE role = %(role)s""",
            {"role": role},
        )
        return cursor.fetchall()
