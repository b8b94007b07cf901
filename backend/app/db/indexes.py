# 컬렉션 인덱스 생성
# 앱 스타트업에서 한 번 ensure_indexes(db)를 await로 호출한다.


async def ensure_indexes(db) -> None:
    # 참조 대상: 이름으로 조회/검증하므로 unique
    await db["cuisines"].create_index("name", unique=True)
    await db["tags"].create_index("name", unique=True)

    # 로그인은 email 정확 일치 조회
    await db["users"].create_index("email", unique=True)

    # 검색용
    await db["recipes"].create_index("name")
    await db["recipes"].create_index("cuisine.name")
    await db["recipes"].create_index("tags.name")
    await db["recipes"].create_index("ingredients.name")
