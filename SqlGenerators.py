from configLoader import ConfigurationError

reserved = {"to", "from", "order", "group", "user", "select", "where"}


# Quote reserved keywords
def quote_col(col):
    return f'"{col}"' if col.lower() in reserved else col


def quote_ident(name):
    return '"' + name.replace('"', '""') + '"'


def demand_options(options):
    if "type" not in options or options["type"] is None:
        raise ConfigurationError('You must specify the "type" for the column! E.g. VARCHAR, INT...')
    length = options.get("length")
    # bool is an int subclass but never a valid length
    if length is not None and (not isinstance(length, int) or isinstance(length, bool)):
        raise ConfigurationError(f'"length" must be an integer, got {length!r}')


# ["type" => "VARCHAR", "length" => 255] -> VARCHAR(255)
def sql_map_options(options):
    options = dict(options)
    demand_options(options)
    option_sql = str(options["type"])
    if options.get("length") is not None:
        option_sql += f"({options['length']})"
    if options.get("unsigned") is True:
        option_sql += " UNSIGNED"
    if options.get("primary_key") is True:
        option_sql += " PRIMARY KEY"
    if options.get("auto_increment") is True:
        option_sql += " AUTO_INCREMENT"
    return option_sql


def sql_create_table(
    table_name,
    columns,
    if_not_exists=True,
):
    # validate everything before building anything
    col_defs = [f"{col_name} {sql_map_options(options)}" for col_name, options in columns.items()]
    exists_clause = "IF NOT EXISTS " if if_not_exists else ""
    return f"CREATE TABLE {exists_clause}{table_name} ({', '.join(col_defs)});"


def sql_table_exists(database_name, table_name, dialect="sqlite", placeHolder="?"):
    if dialect == "sqlite":
        # sqlite has no INFORMATION_SCHEMA, each attached schema has its own master table
        return (
            f"SELECT COUNT(*) FROM {quote_ident(database_name)}.sqlite_master "
            f"WHERE type = 'table' AND name = {placeHolder}"
        ), (table_name,)
    return (
        "SELECT COUNT(*) FROM INFORMATION_SCHEMA.TABLES "
        f"WHERE TABLE_SCHEMA = {placeHolder} AND TABLE_NAME = {placeHolder}"
    ), (database_name, table_name)


def build_insert_sql(cols, name, placeHolder="?"):
    quoted_cols = [quote_col(c) for c in cols]
    return f"""INSERT INTO {name} ({', '.join(quoted_cols)}) VALUES ({', '.join([placeHolder]*len(cols))})"""
