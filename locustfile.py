from locust import HttpUser, task, between

class IntegralUser(HttpUser):
    wait_time = between(0.1, 0.5)

    @task
    def integrate_quadratic(self):
        self.client.get("/numericalintegralservice/0/1?coefficients=0,0,2&policy=left&n=10000")

    @task
    def integrate_cubic(self):
        self.client.get("/numericalintegralservice/1/2?coefficients=1,0,0,1&policy=right&n=2000")
