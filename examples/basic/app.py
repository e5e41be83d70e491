from namedsql import convert_named_to_positional, prepare_named_as_positional

select_user = prepare_named_as_positional(
    "SELECT * FROM users WHERE id = :id AND created > :since::date"
)


def main():
    print(select_user.sql)
    for user_id in (1, 2, 3):
        params = {"id": user_id, "since": "2020-01-01"}
        print(select_user.convert_params(params))

    sql, params = convert_named_to_positional(
        "UPDATE users SET name = :name WHERE id = :id",
        {"id": 4, "name": "Adam"},
    )
    print(sql, params)


if __name__ == "__main__":
    main()
