"""API shapeshift.io: построение запросов, разбор ответов, HTTP-клиент.

Состоит из:
- config: конфигурация клиента (хост, CORS-прокси, таймаут)
- request_builder: операция + аргумент → описание HTTP-запроса
- responses: классификация ответа (успех / ошибка сервиса)
- client: отправка запроса и полный цикл вызова операции
"""
