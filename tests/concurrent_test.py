"""
동시 신청 테스트 스크립트

같은 날짜/성별로 여러 신청을 동시에 보내고
응답 분포, 응답 시간, 500 에러를 확인합니다.

접수 단계의 마감 확인은 확정(confirmed) 인원 기준이므로
동시 신청은 모두 pending 으로 저장되는 것이 정상입니다.
정원 초과 여부는 관리자가 확정할 때 판단합니다.

실행 방법 (pytest 수집 대상 아님):
  python tests/concurrent_test.py --url http://localhost:5000 --date 2026-01-15
"""

import argparse
import json
import threading
import time
from datetime import datetime

import requests


class ConcurrentTester:
    """동시 신청 실행 및 결과 리포트 생성"""

    def __init__(self, base_url, target_date):
        self.base_url = base_url.rstrip('/')
        self.target_date = target_date
        self.test_results = []

    def get_availability(self):
        """현재 날짜 현황 조회"""
        response = requests.get(
            f"{self.base_url}/api/availability",
            params={'date': self.target_date},
            timeout=5
        )
        return response.json()

    def apply_concurrent(self, gender, user_count):
        """
        동시 신청 실행

        Args:
            gender (str): '남' 또는 '여'
            user_count (int): 동시 신청자 수

        Returns:
            dict: {
                'responses': [응답 리스트],
                'status_codes': [상태 코드 리스트],
                'response_times': [응답 시간 리스트]
            }
        """
        responses = []
        status_codes = []
        response_times = []
        lock = threading.Lock()

        def apply_single(user_index):
            """단일 신청"""
            start_time = time.time()

            try:
                response = requests.post(
                    f"{self.base_url}/api/apply",
                    json={
                        'name': f'테스트{user_index}',
                        'age': 30,
                        'gender': gender,
                        'phone': f'010{user_index:08d}',
                        'desiredDate': self.target_date,
                        'agreePrivacy': True,
                        'website': '',
                    },
                    timeout=5
                )

                elapsed = time.time() - start_time

                with lock:
                    responses.append(response.json())
                    status_codes.append(response.status_code)
                    response_times.append(elapsed)

            except requests.RequestException as e:
                elapsed = time.time() - start_time
                with lock:
                    responses.append({'error': str(e)})
                    status_codes.append(0)
                    response_times.append(elapsed)

        threads = [
            threading.Thread(target=apply_single, args=(i,))
            for i in range(user_count)
        ]

        # 동시 시작
        for thread in threads:
            thread.start()

        # 모든 쓰레드 종료 대기
        for thread in threads:
            thread.join()

        return {
            'responses': responses,
            'status_codes': status_codes,
            'response_times': response_times
        }

    def verify_results(self, result, expected_open):
        """
        3가지 검증

        1. 응답 일관성: 마감 전이면 전부 ok, 마감이면 전부 isClosed
        2. 응답 시간: 모든 응답 < 1초
        3. 에러 발생: 500 에러 = 0개
        """
        responses = result['responses']
        status_codes = result['status_codes']
        response_times = result['response_times']

        accepted = sum(1 for r in responses if r.get('ok') is True)
        closed = sum(1 for r in responses if r.get('isClosed') is True)

        if expected_open:
            consistency_pass = accepted == len(responses)
        else:
            consistency_pass = closed == len(responses)

        max_response_time = max(response_times) if response_times else 0.0
        avg_response_time = (
            sum(response_times) / len(response_times) if response_times else 0.0
        )
        error_count = sum(1 for code in status_codes if code >= 500 or code == 0)

        return {
            'consistency': {
                'pass': consistency_pass,
                'accepted': accepted,
                'closed': closed,
            },
            'response_time': {
                'pass': max_response_time < 1.0,
                'avg': round(avg_response_time, 3),
                'max': round(max_response_time, 3),
            },
            'errors': {
                'pass': error_count == 0,
                'error_count': error_count,
            },
            'all_passed': consistency_pass and max_response_time < 1.0 and error_count == 0
        }

    def run_case(self, case_id, gender, concurrent_users):
        """단일 케이스 실행"""
        print(f"\n{'='*60}")
        print(f"Case {case_id}: gender={gender}, users={concurrent_users}, date={self.target_date}")
        print(f"{'='*60}")

        before = self.get_availability()
        closed_key = 'isMaleClosed' if gender == '남' else 'isFemaleClosed'
        expected_open = not before.get(closed_key, False)

        result = self.apply_concurrent(gender, concurrent_users)
        verification = self.verify_results(result, expected_open)

        print(f"  Before: {before}")
        print(f"  Accepted: {verification['consistency']['accepted']} / Closed: "
              f"{verification['consistency']['closed']}")
        print(f"  Response Time: avg={verification['response_time']['avg']}s "
              f"max={verification['response_time']['max']}s")
        print(f"  Errors: {verification['errors']['error_count']}")
        print(f"  Status: {'✅ PASS' if verification['all_passed'] else '❌ FAIL'}")

        case_result = {
            'case_id': case_id,
            'gender': gender,
            'concurrent_users': concurrent_users,
            'before': before,
            'verification': verification,
        }
        self.test_results.append(case_result)
        return case_result

    def run_all_tests(self):
        """
        테스트 케이스:
          TC1: 남성 동시 5명
          TC2: 여성 동시 5명
          TC3: 남성 동시 10명
        """
        for case_id, gender, users in [(1, '남', 5), (2, '여', 5), (3, '남', 10)]:
            self.run_case(case_id, gender, users)

    def generate_report(self):
        """JSON 리포트 생성 (concurrent_report.json)"""
        passed = sum(1 for r in self.test_results if r['verification']['all_passed'])
        report = {
            'test_date': datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            'base_url': self.base_url,
            'target_date': self.target_date,
            'cases': self.test_results,
            'summary': {
                'total': len(self.test_results),
                'passed': passed,
                'failed': len(self.test_results) - passed,
            }
        }

        with open('concurrent_report.json', 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        print(f"\nREPORT: concurrent_report.json ({passed}/{len(self.test_results)} passed)")


def main():
    parser = argparse.ArgumentParser(description='동시 신청 테스트 스크립트')
    parser.add_argument('--url', required=True, help='서버 URL (예: http://localhost:5000)')
    parser.add_argument('--date', required=True, help='희망 날짜 (YYYY-MM-DD)')
    args = parser.parse_args()

    tester = ConcurrentTester(args.url, args.date)

    try:
        tester.run_all_tests()
        tester.generate_report()
    except KeyboardInterrupt:
        print("\n\n테스트 중단됨")


if __name__ == '__main__':
    main()
